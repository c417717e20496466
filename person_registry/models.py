from sqlalchemy import Column, Integer, String
from .database import Base


class Person(Base):
    __tablename__ = "persons"
    id = Column(String(64), primary_key=True)  # chosen by the client
    full_name = Column("FullName", String(255))
    age = Column(Integer)
