from verona.cli import main

main()
