from shopping_mcp.main import main

main()
