from duelsim.main import main

main()
