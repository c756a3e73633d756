"""Service layer — turns a generation policy into a ServiceResult."""
