from animemoi.main import main

main()
