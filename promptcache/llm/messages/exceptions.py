class UnknownRoleError(Exception):
    pass
