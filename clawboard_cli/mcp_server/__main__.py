from clawboard_cli.mcp_server import main

main()
