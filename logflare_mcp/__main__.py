from logflare_mcp.server import main

main()
