from sqlalchemy import BigInteger, Column, String, Integer, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()

# Largest id a signed 64-bit key column holds
MAX_ID = 2 ** 63 - 1


class URLItem(Base):
    __tablename__ = "urls"

    # The short code is the codec encoding of this id.
    # SQLite only autoincrements a plain INTEGER primary key, which is 64-bit there.
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # Nullable during the initial insert, filled in once the id is assigned.
    short_code = Column(String(64), unique=True, index=True, nullable=True)

    original_url = Column(String, index=True, nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    last_accessed_at = Column(DateTime, default=datetime.utcnow)
    click_count = Column(Integer, default=0)
