from gmaint.cli.app import main

main()
