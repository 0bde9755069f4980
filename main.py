# main.py
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
from database import init_db
from Services.customer_router import router as customer_router
from Services.exceptions import CustomerAlreadyExistsError, CustomerServiceError
import logging
import os

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Customer Service API",
    description="""
    API for managing customer records:
    - Creation with unique username, email and mobile number
    - Lookup and search by mobile, username, email, name, age and start date
    - Updates, soft delete and status / mobile number patches
    """,
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def envelope(code: int, message: str, data=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        headers=headers,
        content=jsonable_encoder({"code": code, "message": message, "data": data})
    )

# Domain failures become {code, message, data} responses
@app.exception_handler(CustomerServiceError)
async def customer_error_handler(request: Request, exc: CustomerServiceError):
    data = {"fields": exc.fields} if isinstance(exc, CustomerAlreadyExistsError) else None
    return envelope(exc.status_code, exc.message, data)

# Routing and body-parsing failures raised by Starlette/FastAPI
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return envelope(exc.status_code, str(exc.detail), headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return envelope(422, "Request validation failed", exc.errors())

# Exception handler for unexpected errors
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error processing request: {exc}", exc_info=True)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

# Include routers
app.include_router(
    customer_router,
    prefix="/api/customer/v1",
    tags=["Customer Management"]
)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    logger.info("Initializing database...")
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise

@app.get("/")
async def root():
    return {
        "message": "Welcome to the Customer Service API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

@app.get("/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
