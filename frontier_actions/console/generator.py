import re
from dataclasses import dataclass
from pathlib import Path

from frontier_actions.core.config import Settings
from frontier_actions.util.logger import logger

DEFAULT_STUB = Path(__file__).parent / "stubs" / "action.stub"


def to_snake_case(name: str) -> str:
    """Convert CamelCase to snake_case"""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def class_name(name: str) -> str:
    name = name.strip()
    return name[:1].upper() + name[1:]


def module_identifier(module: str) -> str:
    """'billing-core' -> 'billing_core'"""
    return re.sub(r"\W", "_", to_snake_case(module).replace("-", "_"))


def render_stub(text: str, variables: dict[str, str]) -> str:
    for key, replacement in variables.items():
        text = text.replace(f"${key}$", replacement)
    return text


@dataclass(frozen=True)
class ActionTarget:
    path: Path
    namespace: str
    class_name: str

    @property
    def variables(self) -> dict[str, str]:
        return {"NAMESPACE": self.namespace, "CLASS_NAME": self.class_name}


@dataclass(frozen=True)
class GeneratedFile:
    path: Path
    created: bool


def resolve_target(name: str, module: str | None, settings: Settings) -> ActionTarget:
    """
    Work out where an action named ``name`` goes.

    Without a module the file lands in ``actions_path`` under the default
    namespace; with one it lands in the module source tree,
    ``<modules_directory>/<module>/src/actions``, and the
    namespace becomes ``<modules_namespace>.<module>.actions``.
    """
    cls = class_name(name)
    filename = f"{to_snake_case(cls)}.py"
    base = Path(settings.base_path)

    if module:
        return ActionTarget(
            path=base / settings.modules_directory / module / "src" / "actions" / filename,
            namespace=f"{settings.modules_namespace}.{module_identifier(module)}.actions",
            class_name=cls,
        )

    return ActionTarget(
        path=base / settings.actions_path / filename,
        namespace=settings.actions_namespace,
        class_name=cls,
    )


def write_if_missing(path: Path, contents: str) -> GeneratedFile:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        return GeneratedFile(path=path, created=False)

    path.write_text(contents, encoding="utf-8")
    logger.info("Generated %s", path)
    return GeneratedFile(path=path, created=True)


class ActionGenerator:
    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def stub_path(self) -> Path:
        return Path(self.settings.stub_path) if self.settings.stub_path else DEFAULT_STUB

    def generate(self, name: str, module: str | None = None) -> GeneratedFile:
        target = resolve_target(name, module, self.settings)
        stub = self.stub_path.read_text(encoding="utf-8")
        return write_if_missing(target.path, render_stub(stub, target.variables))
