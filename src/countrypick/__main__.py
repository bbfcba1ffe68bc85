from countrypick.main import main

main()
