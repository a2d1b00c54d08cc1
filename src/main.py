import logging
import os
from fastapi import FastAPI
from src.api.common.utils.navigation import RedirectTo, redirect_exception_handler
from src.api.routes import api_router


def create_app() -> FastAPI:
    """Build the dashboard API with its routers and redirect handling."""
    app = FastAPI(
        title="Invoice Dashboard",
        description="Invoice management actions for the dashboard",
        version="1.0.0",
    )

    # Services end successful form submissions by raising RedirectTo
    app.add_exception_handler(RedirectTo, redirect_exception_handler)

    app.include_router(api_router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = create_app()

# this only runs if `$ python src/main.py` is executed
if __name__ == '__main__':
    import uvicorn
    PORT = int(os.environ.get('PORT', 3001))
    uvicorn.run("src.main:app", host='0.0.0.0', port=PORT, reload=True)
