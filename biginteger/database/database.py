from sqlalchemy.orm import declarative_base

Base = declarative_base()  # Single instance of Base


def get_orm_base():
    return Base
