# api/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.sa.database import db
from api.routes import books, holders, ledger

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Bookstore Ledger")

# CORS configuration
origins = [
    "http://localhost:5173",
    "http://localhost:4173",
    "http://localhost",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    db.init_db()

app.include_router(ledger.router)
app.include_router(books.router)
app.include_router(holders.router)

@app.get("/")
async def root():
    return {"message": "Bookstore Ledger"}
