# onelittlething/main.py
import os
from pathlib import Path
from dotenv import load_dotenv

# Cargar .env de la raíz del proyecto antes de importar el resto
env_path = Path(__file__).resolve().parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from onelittlething.routes import children, dates

app = FastAPI(title="OneLittleThing Dates API")

cors_origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Montar rutas
app.include_router(dates.router)
app.include_router(children.router)


@app.get("/health")
async def health():
    return {"status": "ok", "pregnancy_timezone": dates.PREGNANCY_TIMEZONE}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("onelittlething.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
