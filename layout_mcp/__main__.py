from layout_mcp.main_mcp import main

main()
