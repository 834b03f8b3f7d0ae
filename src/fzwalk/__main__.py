from fzwalk.cli import main

main()
