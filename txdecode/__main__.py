from txdecode.main import main

main()
