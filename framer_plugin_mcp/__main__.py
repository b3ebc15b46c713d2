from framer_plugin_mcp.server import main

main()
