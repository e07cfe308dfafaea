"""
Database module - motor client lifecycle.

    mongo = MongoDB()
    await mongo.connect(uri, database_name)
    set_main_database(mongo)
    assessments = get_main_database().database["assessments"]
"""

from common.database.mongodb import MongoDB, get_main_database, set_main_database

__all__ = ["MongoDB", "get_main_database", "set_main_database"]
