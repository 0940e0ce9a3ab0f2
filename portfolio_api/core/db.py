from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from portfolio_api.core.config import settings


def create_mongo_client(uri: str = None) -> MongoClient:
    # tz_aware so timestamps read back as UTC-aware datetimes
    return MongoClient(uri or settings.MONGO_URI, tz_aware=True)


def get_db_from_request(request: Request) -> Database:
    return request.app.state.db
