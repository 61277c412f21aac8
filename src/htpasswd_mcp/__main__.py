from htpasswd_mcp.cli import app

app()
