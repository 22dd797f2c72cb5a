from ordercal.app import main

main()
