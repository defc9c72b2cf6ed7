from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from erdify.config import get_cors_origins
from erdify.routers import schema_router

app = FastAPI(title="erdify Schema API")

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schema_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
