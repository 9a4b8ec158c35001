from lintgate.cli import main

main()
