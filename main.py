from fastapi import FastAPI
from local_file_reader.api.routes import router
from local_file_reader.config import Config
from local_file_reader.mcp.servers.srv_fs import SERVER_NAME, SERVER_VERSION
from local_file_reader.observability.logger import logger
import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Local File Reader",
    description="HTTP inspection surface for the MCP local file reader",
    version=SERVER_VERSION
)

app.include_router(router)

@app.on_event("startup")
async def startup_event():
    logger.info("application_started")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_stopped")

@app.get("/")
async def root():
    return {
        "service": SERVER_NAME,
        "version": SERVER_VERSION,
        "status": "healthy"
    }

@app.get("/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    config = Config.from_env()
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        log_level=config.LOG_LEVEL.lower()
    )
