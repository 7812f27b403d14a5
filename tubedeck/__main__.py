from tubedeck.cli import main

main()
