from autocomment.cli import main

main()
