"""
Membership Backend — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and database.
How:   One service per resource, each a CrudService subclass with a
       module-level singleton. Services are stateless: the request's
       AsyncSession is passed into every call.

Service Inventory:
    - DepartmentService, RoleService, EventTypeService: plain CRUD
    - EventService: CRUD with the event type name joined into reads
    - MemberService: CRUD plus get_by_email
    - filters: Condition values accepted by get_many
"""
