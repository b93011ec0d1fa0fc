from raceglobe.app import main

main()
