from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: models are registered via app.db.models, imported by init_db()
# All models must import Base from this module
