"""User persistence."""
from sqlmodel import Session, func, select

from stock_quote_api.db.models import StockQuery, User


class UserRepository:
    """CRUD over the users table using the session it was built with."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[User]:
        return list(self._session.exec(select(User).order_by(User.id)))

    def find_by_id(self, user_id: int) -> User | None:
        return self._session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return self._session.exec(select(User).where(User.email == email)).first()

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(User)).one()

    def create(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user

    def update(self, user: User, **changes: str) -> User:
        for field, value in changes.items():
            setattr(user, field, value)
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Delete the user together with its stock query history."""
        history = self._session.exec(select(StockQuery).where(StockQuery.user_id == user.id))
        for query in history:
            self._session.delete(query)
        self._session.delete(user)
        self._session.commit()
