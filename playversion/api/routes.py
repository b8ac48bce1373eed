import logging

from fastapi import APIRouter, HTTPException, status, Depends

from playversion.exceptions import NotFound, FetchError, ParseFailed
from playversion.models.schemas import VersionResponse
from playversion.services.version_lookup import VersionLookup

logger = logging.getLogger(__name__)
router = APIRouter()


# Dependency injection for services
def get_version_lookup():
    lookup = VersionLookup()
    try:
        yield lookup
    finally:
        lookup.close()


@router.get("/{package_name}", response_model=VersionResponse)
def get_version(
        package_name: str,
        lookup: VersionLookup = Depends(get_version_lookup)
):
    """
    Look up the current Play Store version of an application

    **Parameters:**
    - package_name: The application package name, e.g. com.example.app

    **Returns:**
    - The package name and its published version ("0.0.0" when it varies with device)

    **Error Codes:**
    - 404: Package not found on the Play Store
    - 502: Page fetched but no version could be parsed from it
    - 500: Play Store unreachable or returned a server error
    """
    try:
        version = lookup.lookup_version(package_name)
    except NotFound:
        logger.warning(f"Package not found: {package_name}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Package not found"
        )
    except ParseFailed as e:
        logger.error(f"Error fetching version for {package_name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not parse Play Store page"
        )
    except FetchError as e:
        logger.error(f"Error fetching version for {package_name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving app information"
        )

    return VersionResponse(identifier=package_name, version=version)
