# models.py
from sqlalchemy import JSON, BigInteger, Column, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class HeadacheEntry(Base):
    __tablename__ = "headache_entries"

    id = Column(Integer, primary_key=True, index=True)
    score = Column(Float, nullable=False)  # 0-5
    notes = Column(Text, nullable=False, default="")
    created_at = Column(BigInteger, nullable=False, index=True)  # epoch ms, never updated
    potential_causes = Column(JSON, nullable=False, default=list)
    locations = Column(JSON, nullable=False, default=list)
    time_of_day = Column(String, nullable=True)
