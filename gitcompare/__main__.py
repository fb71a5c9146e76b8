from gitcompare.main import main

main()
