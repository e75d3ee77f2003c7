from assignlang.cli import main

main()
