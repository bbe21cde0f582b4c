"""
Modèles Pydantic de la feature 'payments' (JSON camelCase <-> attributs snake_case).
"""
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Amount = Union[int, float]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class CheckoutRequest(CamelModel):
    """
    Intention d'achat d'abonnement envoyée par l'app.
    Tous les champs sont optionnels au niveau du schéma: la présence des champs
    obligatoires est vérifiée par le service (400 "Missing required fields", pas 422).
    """
    user_id: Optional[str] = None
    gym_id: Optional[str] = None
    plan_id: Optional[str] = None
    gym_name: Optional[str] = None
    plan_name: Optional[str] = None
    duration_days: Optional[str] = None
    amount: Optional[Amount] = None
    quantity: Optional[int] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    user_name: Optional[str] = None
    image: Optional[str] = None


class StatusRequest(CamelModel):
    session_id: Optional[str] = None


class LineItem(CamelModel):
    name: str
    quantity: int = 1
    price: Amount
    description: str
    image: str


class Beneficiary(CamelModel):
    account_number: str
    bank: str
    amount: Amount


class SessionPayload(CamelModel):
    cancel_url: str
    error_url: str
    notify_url: str
    success_url: str
    phone: str
    email: str
    nonce: str
    payment_methods: List[str]
    expire_date: str
    items: List[LineItem]
    beneficiaries: List[Beneficiary]
    lang: str = "EN"


class SessionHandle(CamelModel):
    """Résultat partiel: ArifPay ne garantit pas la présence de ces champs."""
    session_id: Optional[str] = None
    payment_url: Optional[str] = None
    cancel_url: Optional[str] = None


class CheckoutSessionHandle(SessionHandle):
    success: bool = True
    message: str = "Checkout session created successfully"
