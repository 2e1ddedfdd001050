"""Pydantic models for simplified selectors and per-publisher site profiles."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ById(BaseModel):
    """Match the first element whose ``id`` equals ``value``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['id'] = 'id'
    value: str = Field(description='Element id to match exactly')

    def __str__(self) -> str:
        return f'#{self.value}'


class ByClass(BaseModel):
    """Match the first element whose ``class`` attribute contains ``value``.

    Containment is a plain substring test, so ``content`` also matches
    ``sub-content-wrapper``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal['class'] = 'class'
    value: str = Field(description='Substring to look for in the class attribute')

    def __str__(self) -> str:
        return f'[class*="{self.value}"]'


class ByTag(BaseModel):
    """Match the first element with the given tag name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['tag'] = 'tag'
    value: str = Field(description='Element name')

    def __str__(self) -> str:
        return self.value


SelectorSpec = Annotated[ById | ByClass | ByTag, Field(discriminator='kind')]


class SiteProfile(BaseModel):
    """Title and content selector priority lists for one publisher.

    Attributes:
        site_key: Short publisher token (e.g. 'naver')
        title_selectors: Selectors tried in order for the headline
        content_selectors: Selectors tried in order for the article body

    """

    model_config = ConfigDict(frozen=True)

    site_key: str
    title_selectors: tuple[SelectorSpec, ...] = ()
    content_selectors: tuple[SelectorSpec, ...] = ()
