from cords.app import main

main()
