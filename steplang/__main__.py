from steplang.cmdline import main

main()
