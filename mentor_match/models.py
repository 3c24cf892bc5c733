# mentor_match/models.py
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, LargeBinary, ForeignKey, Sequence,
    CheckConstraint, UniqueConstraint, Index, text,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from .database import Base

class UserRole(str, Enum):
    MENTOR = "mentor"
    MENTEE = "mentee"

# Enum for Matching Request Status
class MatchingStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted" # terminal
    REJECTED = "rejected" # terminal


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('mentor', 'mentee')", name="ck_users_role"),
        Index("idx_users_role", "role"),
    )

    id = Column(Integer, Sequence('user_id_seq'), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)  # never changed after signup
    bio = Column(Text, nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_type = Column(String, nullable=True)
    # JSON-encoded list of strings, only meaningful for mentors
    skills = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    sent_requests = relationship(
        "MatchingRequest", foreign_keys="MatchingRequest.mentee_id", back_populates="mentee"
    )
    received_requests = relationship(
        "MatchingRequest", foreign_keys="MatchingRequest.mentor_id", back_populates="mentor"
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class MatchingRequest(Base):
    __tablename__ = "matching_requests"
    __table_args__ = (
        UniqueConstraint("mentee_id", "mentor_id", name="uq_matching_requests_pair"),
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')", name="ck_matching_requests_status"
        ),
        # At most one pending request per mentee
        Index(
            "uq_matching_requests_mentee_pending", "mentee_id", unique=True,
            postgresql_where=text("status = 'pending'"),
            sqlite_where=text("status = 'pending'"),
        ),
        # At most one accepted request per mentor
        Index(
            "uq_matching_requests_mentor_accepted", "mentor_id", unique=True,
            postgresql_where=text("status = 'accepted'"),
            sqlite_where=text("status = 'accepted'"),
        ),
        Index("idx_matching_requests_status", "status"),
    )

    id = Column(Integer, Sequence('matching_request_id_seq'), primary_key=True, index=True)

    mentee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    message = Column(Text, nullable=False, default="")
    status = Column(String, default=MatchingStatus.PENDING.value, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    mentee = relationship("User", foreign_keys=[mentee_id], back_populates="sent_requests")
    mentor = relationship("User", foreign_keys=[mentor_id], back_populates="received_requests")

    def __repr__(self):
        return f"<MatchingRequest(id={self.id}, mentee_id={self.mentee_id}, mentor_id={self.mentor_id}, status='{self.status}')>"
