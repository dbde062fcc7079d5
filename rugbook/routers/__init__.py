"""HTTP routers mounted under /api by rugbook.main."""
