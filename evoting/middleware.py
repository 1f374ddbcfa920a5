from fastapi.middleware.cors import CORSMiddleware

from evoting.config import ORIGINS


def register_middlewares(app):
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
