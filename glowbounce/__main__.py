from glowbounce.run import main

main()
