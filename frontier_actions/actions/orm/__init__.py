from frontier_actions.actions.orm.count_action import CountAction
from frontier_actions.actions.orm.create_action import CreateAction
from frontier_actions.actions.orm.delete_action import DeleteAction
from frontier_actions.actions.orm.exists_action import ExistsAction
from frontier_actions.actions.orm.find_action import FindAction
from frontier_actions.actions.orm.find_or_fail_action import FindOrFailAction
from frontier_actions.actions.orm.retrieve_action import RetrieveAction, RetrievePaginateAction
from frontier_actions.actions.orm.update_action import UpdateAction
from frontier_actions.actions.orm.update_or_create_action import UpdateOrCreateAction

__all__ = [
    "CountAction",
    "CreateAction",
    "DeleteAction",
    "ExistsAction",
    "FindAction",
    "FindOrFailAction",
    "RetrieveAction",
    "RetrievePaginateAction",
    "UpdateAction",
    "UpdateOrCreateAction",
]
