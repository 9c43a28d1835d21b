from kilo_editor.cli.main import main

main()
