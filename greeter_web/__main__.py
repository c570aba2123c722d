from .cli.serve_commands import main

if __name__ == "__main__":
    main()
