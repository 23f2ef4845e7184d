from clinic_api.server import main

main()
