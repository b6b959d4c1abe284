from tokenstore.persistence.sqlalchemy.models.token_record_model import TokenRecordModel

__all__ = ["TokenRecordModel"]
