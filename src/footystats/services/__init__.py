"""
Request orchestration for FootyStats (match service, sorting, pagination).
"""
