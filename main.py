import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contact_manager import config
from contact_manager.db import mongo
from contact_manager.routes import contacts
from contact_manager.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Contact Manager")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    setup_logging()
    logger.info("Contact manager starting", extra={"port": config.PORT})
    await mongo.ping()


@app.on_event("shutdown")
async def shutdown():
    mongo.close_client()


# Bad JSON or wrongly typed fields: same {message} shape as every other failure
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    logger.warning("Malformed request", extra={"path": request.url.path, "details": details})
    return JSONResponse(content={"message": f"Invalid request body: {details}"}, status_code=400)


@app.get("/")
def root():
    return {"message": "Contact manager backend running"}


app.include_router(contacts.router)
# The browser frontend calls /api/contacts
app.include_router(contacts.router, prefix="/api", include_in_schema=False)

# Dev entry point
if __name__ == "__main__":
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, reload=True)
