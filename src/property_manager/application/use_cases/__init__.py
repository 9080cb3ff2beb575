from .apartment_use_case import ApartmentUseCase, ApartmentNotFoundError

__all__ = ['ApartmentUseCase', 'ApartmentNotFoundError']
