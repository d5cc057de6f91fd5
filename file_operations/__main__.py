from file_operations.file_system import main

main()
