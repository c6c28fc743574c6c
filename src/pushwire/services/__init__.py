"""Service layer: decode/encode operations returning ServiceResult."""
