import os


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "mysql+pymysql://root:@localhost/LibraryDB"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    SQLALCHEMY_ECHO = os.getenv("SQLALCHEMY_ECHO", "0") == "1"

    # CREATE DATABASE / USE preamble in dumped DDL
    LIBRARY_DATABASE_NAME = os.getenv("LIBRARY_DATABASE_NAME", "LibraryDB")

    # create missing tables when the app starts
    LIBRARY_AUTO_CREATE_SCHEMA = os.getenv("LIBRARY_AUTO_CREATE_SCHEMA", "1") == "1"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_ECHO = False
    LIBRARY_AUTO_CREATE_SCHEMA = True
    LOG_LEVEL = "DEBUG"
