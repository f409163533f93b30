from greeter.app import main

main()
