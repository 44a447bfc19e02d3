"""
StudyMate Backend — Services Layer
=====================================

What:  Business logic sitting between routes (HTTP) and MongoDB (persistence).
How:   Services receive the MongoStore on every call, build predicates with
       studymate.queries and return serialized documents.

Service Inventory:
    - CollectionService (base): id-addressed get / merge / delete for one collection
    - PartnerService: listing, ranking, CRUD, counters, request-a-partner
    - RequestService: per-requester listing, merge-update, delete
"""
