"""Modèles du catalogue : clients, catégories et produits.

FR: Entités gérées par le store et référencées par les factures.
EN: Entities managed by the store and referenced by invoices.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class Client(BaseModel):
    """Client facturé.

    FR: Coordonnées reprises dans le bloc « Client » de l'aperçu.
    EN: Contact details shown in the preview's client block.
    """

    id: str | None = Field(default=None, description="Identifiant / Identifier")
    nom: str = Field(..., description="Raison sociale / Legal name")
    adresse: str = Field(default="", description="Adresse postale / Postal address")
    telephone: str = Field(default="", description="Téléphone / Phone number")
    email: str = Field(default="", description="Adresse email / Email address")
    tva: str = Field(
        default="",
        description="Matricule fiscal / Tax registration number",
    )


class Category(BaseModel):
    """Catégorie de produits."""

    id: str | None = Field(default=None, description="Identifiant / Identifier")
    nom: str = Field(..., description="Libellé / Label")


class Product(BaseModel):
    """Produit ou prestation du catalogue.

    FR: Le prix unitaire HT est recopié dans la ligne de facture lors de la
        sélection du produit. La catégorie est résolue en lecture seulement.
    EN: The unit price is copied into the invoice line when the product is
        selected. The category is resolved on read only.
    """

    id: str | None = Field(default=None, description="Identifiant / Identifier")
    designation: str = Field(..., description="Désignation / Item description")
    prix_unitaire_ht: Decimal = Field(
        ...,
        description="Prix unitaire HT / Unit price excl. tax",
    )
    categorie_id: str = Field(..., description="Catégorie / Category identifier")
    categorie: Category | None = Field(
        default=None,
        description="Catégorie résolue (lecture) / Resolved category (read side)",
    )


class CompanyInfo(BaseModel):
    """Coordonnées de l'émetteur des factures.

    FR: Bloc « Émetteur » et pied de page de l'aperçu imprimable.
    EN: Issuer block and footer of the printable preview.
    """

    name: str = Field(..., description="Raison sociale / Legal name")
    address: str = Field(default="", description="Adresse / Address")
    phone: str = Field(default="", description="Téléphone / Phone number")
    email: str = Field(default="", description="Adresse email / Email address")
    tax_id: str = Field(default="", description="Matricule fiscal / Tax id")
    rib: str = Field(default="", description="Relevé d'identité bancaire / RIB")
    bank: str = Field(default="", description="Banque / Bank name")
    trade_register: str = Field(
        default="",
        description="Registre de commerce / Trade register number",
    )
    tax_regime: str = Field(default="Réel", description="Régime fiscal / Tax regime")
