from remix_init.initializer import main

if __name__ == "__main__":
    main()
