from cargo_hooks.cli.main import main

main()
