"""SQLAlchemy ORM models for applications and their holdings"""

import uuid
from sqlalchemy import Column, String, Boolean, Date, DateTime, ForeignKey, Integer, Numeric, Text, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class ApplicationRecord(Base):
    """Onboarding / account application"""

    __tablename__ = "application"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    reference_number = Column(Text, nullable=False, unique=True)
    state = Column(String(32), nullable=False, index=True)
    applied_on = Column(Date, nullable=False)
    is_legal_entity = Column(Boolean, nullable=False, default=False)
    legal_entity_name = Column(Text, nullable=True)
    legal_entity_registration_number = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    applicant = relationship("ApplicantRecord", back_populates="application", uselist=False, cascade="all, delete-orphan")
    products = relationship(
        "ProductRecord",
        back_populates="application",
        cascade="all, delete-orphan",
        order_by="ProductRecord.position",
    )
    reviews = relationship(
        "ReviewRecord",
        back_populates="application",
        cascade="all, delete-orphan",
        order_by=lambda: [ReviewRecord.created_at, ReviewRecord.id],
    )


class ApplicantRecord(Base):
    """Person who submitted the application"""

    __tablename__ = "applicant"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid, ForeignKey("application.id", ondelete="CASCADE"), nullable=False, unique=True)
    first_name = Column(Text, nullable=False)
    surname = Column(Text, nullable=False)

    application = relationship("ApplicationRecord", back_populates="applicant")


class ProductRecord(Base):
    """Product held under an application"""

    __tablename__ = "product"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid, ForeignKey("application.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    application = relationship("ApplicationRecord", back_populates="products")
    funds = relationship(
        "FundRecord",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="FundRecord.position",
    )


class FundRecord(Base):
    """Fund holding within a product"""

    __tablename__ = "fund"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid, ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    fees = Column(Numeric(18, 2), nullable=False, default=0)
    position = Column(Integer, nullable=False, default=0)

    product = relationship("ProductRecord", back_populates="funds")


class ReviewRecord(Base):
    """Review placed on an application; the latest one is current"""

    __tablename__ = "application_review"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    application_id = Column(Uuid, ForeignKey("application.id", ondelete="CASCADE"), nullable=False, index=True)
    reason = Column(Text, nullable=False, default="")
    reviewed_on = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    application = relationship("ApplicationRecord", back_populates="reviews")
