from fourgrid.main import main

main()
