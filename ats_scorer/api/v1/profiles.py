from fastapi import APIRouter

from ats_scorer.schemas import ProfileSummary, ProfilesResponse
from ats_scorer.taxonomy import get_default_taxonomy

router = APIRouter()


@router.get("/profiles", response_model=ProfilesResponse)
async def list_profiles():
    taxonomy = get_default_taxonomy()
    return ProfilesResponse(
        profiles=[
            ProfileSummary(
                id=profile.key,
                label=profile.label,
                categories={name: list(keywords) for name, keywords in profile.categories.items()},
            )
            for profile in taxonomy.profiles.values()
        ]
    )
