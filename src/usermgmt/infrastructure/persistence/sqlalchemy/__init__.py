"""SQLAlchemy persistence: models, audit listener, repositories, schema setup."""
