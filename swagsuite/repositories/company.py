"""Company and contact repositories."""


from swagsuite.domain.company import Company, Contact
from swagsuite.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company
    search_columns = ("name", "industry", "email")


class ContactRepository(BaseRepository[Contact]):
    model = Contact
    search_columns = ("first_name", "last_name", "email")
