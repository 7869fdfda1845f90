import os
import uvicorn

if __name__ == "__main__":
    # Load .env before main builds the app so STORAGE_BACKEND and friends apply
    from dotenv import load_dotenv

    load_dotenv()

    from main import app

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    print(f"Starting ModVoyage on http://{host}:{port}")
    print(f"API docs: http://{host}:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
