from frontier_actions.console.cli import main

main()
