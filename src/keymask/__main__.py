from keymask.cli import main

main()
