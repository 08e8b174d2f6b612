from agriadvise.models.advice import GetMainCropForRegionInput

from .rendering import AdvicePrompt, render

MAIN_CROP_FOR_REGION_PROMPT = """You are an agricultural expert for India. Given a region, name the single most prominent crop grown there.

Region: {region}

Respond with only the name of the crop. For example, if the region is Punjab, respond with "Wheat".
"""


def build_main_crop_prompt(data: GetMainCropForRegionInput) -> AdvicePrompt:
    return AdvicePrompt(text=render(MAIN_CROP_FOR_REGION_PROMPT, region=data.region))
