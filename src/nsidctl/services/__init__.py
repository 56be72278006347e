"""Service layer — validation operations returning ServiceResult."""
