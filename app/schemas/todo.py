from pydantic import BaseModel

class TodoBase(BaseModel):
    text: str

class TodoCreate(TodoBase):
    user_id: int

class TodoUpdate(TodoBase):
    id: int
