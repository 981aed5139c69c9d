"""Stock query history persistence."""
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from stock_quote_api.db.models import StockQuery
from stock_quote_api.schemas import StockQuote


class StockQueryRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, user_id: int, quote: StockQuote) -> StockQuery:
        record = StockQuery(
            user_id=user_id,
            symbol=quote.symbol,
            name=quote.name,
            open=quote.open,
            high=quote.high,
            low=quote.low,
            close=quote.close,
        )
        self._session.add(record)
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            raise
        self._session.refresh(record)
        return record

    def get_user_history(self, user_id: int) -> list[StockQuery]:
        """All queries of a user, newest first."""
        statement = (
            select(StockQuery)
            .where(StockQuery.user_id == user_id)
            .order_by(col(StockQuery.created_at).desc(), col(StockQuery.id).desc())
        )
        return list(self._session.exec(statement))
