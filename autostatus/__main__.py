from autostatus.main import main

main()
