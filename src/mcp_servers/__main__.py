from mcp_servers.cli import main

main()
