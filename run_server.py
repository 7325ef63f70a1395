import uvicorn

from community_site.config import load_settings

if __name__ == "__main__":
    settings = load_settings()
    print(f"Starting Community Site API on port {settings.port}...")
    print(f"Docs available at: http://localhost:{settings.port}/docs")

    uvicorn.run(
        "community_site.server:build_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        reload=True,
    )
