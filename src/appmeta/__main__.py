from appmeta.main import main

main()
