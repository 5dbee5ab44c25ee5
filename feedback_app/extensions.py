from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS


db = SQLAlchemy()
cors = CORS()  # semua origin diizinkan, dashboard bisa jalan di host lain
