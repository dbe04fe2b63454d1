"""Leaderboard persistence backed by SQLAlchemy."""

import logging

from sqlalchemy import Column, DateTime, Integer, String, create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

TOP_STATS_LIMIT = 10
MAX_NAME_LENGTH = 100
MAX_DIFFICULTY_LENGTH = 20
# Upper bound of a 32-bit signed INTEGER column.
MAX_TIME_TAKEN_SECONDS = 2**31 - 1


class StatsError(Exception):
    pass


class GameStat(Base):
    __tablename__ = "game_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    player_name = Column(String(MAX_NAME_LENGTH), nullable=False)
    difficulty = Column(String(MAX_DIFFICULTY_LENGTH), nullable=False, default="")
    time_taken_seconds = Column(Integer, nullable=False)
    solved_at = Column(DateTime, nullable=False, server_default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "playerName": self.player_name,
            "difficulty": self.difficulty,
            "timeTakenSeconds": self.time_taken_seconds,
            "solvedAt": self.solved_at.strftime("%Y-%m-%d %H:%M") if self.solved_at else "",
        }


class StatsStore:
    def __init__(self, url):
        try:
            self.engine = create_engine(url, pool_pre_ping=True)
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            raise StatsError(f"failed to connect to db: {e}") from e
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        logger.info("db connected")

    def migrate(self):
        logger.info("Running database migrations...")
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StatsError(f"failed to migrate: {e}") from e
        logger.info("Migrations applied successfully!")

    def save_stat(self, player_name, difficulty, time_taken_seconds):
        stat = GameStat(
            player_name=player_name,
            difficulty=difficulty or "",
            time_taken_seconds=time_taken_seconds,
        )
        try:
            with self.session_factory() as session, session.begin():
                session.add(stat)
        except SQLAlchemyError as e:
            raise StatsError(f"insert error: {e}") from e
        logger.info("Saved stat for %s (%s, %ds)", player_name, difficulty, time_taken_seconds)

    def get_top_stats(self, limit=TOP_STATS_LIMIT):
        query = (
            select(GameStat)
            .order_by(GameStat.time_taken_seconds.asc(), GameStat.id.asc())
            .limit(limit)
        )
        try:
            with self.session_factory() as session:
                return [stat.to_dict() for stat in session.scalars(query)]
        except SQLAlchemyError as e:
            raise StatsError(f"select error: {e}") from e

    def close(self):
        self.engine.dispose()
