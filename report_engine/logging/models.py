"""Database models for the logging module."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Float, Text
from report_engine.core.database import Base


class RequestLog(Base):
    """One API request/response pair, written after the response is sent."""

    __tablename__ = "request_log"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(DateTime, default=datetime.now, index=True)
    method = Column(String, nullable=False)
    path = Column(String, nullable=False)
    query_string = Column(String, nullable=True)  # carries page_index / size of report calls
    status_code = Column(Integer, nullable=False)
    client_ip = Column(String, nullable=True)
    request_body = Column(Text, nullable=True)
    response_body = Column(Text, nullable=True)
    processing_time = Column(Float, nullable=True)  # milliseconds
    user_agent = Column(String, nullable=True)
    username = Column(String, nullable=True)  # User header, else the service's OS user
    hostname = Column(String, nullable=True)
    application_id = Column(String, nullable=True)
