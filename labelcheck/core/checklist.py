"""Fixed food label checklist evaluated against every uploaded image."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ChecklistItem:
    id: int
    text: str

    def render(self) -> str:
        return f"{self.id}. {self.text}"


MASTER_CHECKLIST: Tuple[ChecklistItem, ...] = (
    ChecklistItem(1, "Product name is clearly stated"),
    ChecklistItem(2, "Net weight or volume is shown"),
    ChecklistItem(3, "Ingredient list is complete and in descending order by weight"),
    ChecklistItem(4, "Allergens are clearly emphasised within the ingredient list (e.g. bold or capitals)"),
    ChecklistItem(5, "A nutrition information panel is present"),
    ChecklistItem(6, "Nutrition values are declared per 100g or 100ml"),
    ChecklistItem(7, "Energy value is declared in both kJ and kcal"),
    ChecklistItem(8, "Serving size and number of servings per pack are stated"),
    ChecklistItem(9, "Name and address of the manufacturer, packer or distributor is provided"),
    ChecklistItem(10, "Country of origin is stated"),
    ChecklistItem(11, "A 'best before' or 'use by' date is shown"),
    ChecklistItem(12, "Storage conditions are stated"),
    ChecklistItem(13, "Instructions for use or preparation are given where needed"),
    ChecklistItem(14, "A lot or batch number is shown"),
    ChecklistItem(15, "Food additives are declared by category and by name or E-number"),
    ChecklistItem(16, "Nutrition or health claims are consistent with the declared nutrition values"),
    ChecklistItem(17, "Mandatory text is legible, with sufficient font size and contrast"),
    ChecklistItem(18, "Provide a brief, one-sentence summary of the overall label compliance"),
)


def render_checklist(items: Tuple[ChecklistItem, ...] = MASTER_CHECKLIST) -> str:
    """Render items as "<id>. <text>" separated by blank lines."""
    return "\n\n".join(item.render() for item in items)
