"""
StudyMate Backend — Document Models
=====================================

What:  Field names and constructors for the documents stored in MongoDB.
       Collections are schemaless; these modules only describe the fields
       the server itself reads or writes.

Model Inventory:
    - document.py: serialization and write-protection helpers shared by both collections
    - partner.py:  partner counters and the snapshot copied into requests
    - request.py:  construction of a partner-request document
"""
