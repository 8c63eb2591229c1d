from ke2daira.cli import main

if __name__ == "__main__":
    main()
