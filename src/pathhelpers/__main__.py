from pathhelpers.cli import main

main()
