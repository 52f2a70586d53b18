from mcp_compass import main

if __name__ == "__main__":
    main()
