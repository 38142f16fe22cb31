from sqlalchemy import Boolean, Column, Integer, String, ForeignKey, false
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.user import User

class Todo(Base):
    __tablename__ = "todo"
    id = Column(Integer, primary_key=True, index=True)
    text = Column(String(255), nullable=False)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False)

    user = relationship(User, back_populates="todos")
