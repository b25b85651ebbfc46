from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from board.database import Base


class Post(Base):
    __tablename__ = "posts"

    post_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def update(self, title: str, content: str) -> None:
        """Replace title and content in place; the key never changes."""
        self.title = title
        self.content = content

    def __repr__(self) -> str:
        return f"Post(post_id={self.post_id!r}, title={self.title!r})"
