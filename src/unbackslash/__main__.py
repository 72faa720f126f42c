from unbackslash.cli import main

main()
