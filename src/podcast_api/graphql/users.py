"""
podcast_api.graphql.users

Account and profile resolvers.

Responsibilities:
- Public: createAccount, login.
- Authenticated: me, seeProfile, editProfile.
"""

import strawberry
from strawberry.types import Info

from podcast_api.graphql.context import GraphQLContext
from podcast_api.graphql.permissions import IsAuthenticated
from podcast_api.graphql.types import (
    CreateAccountInput,
    CreateAccountOutput,
    EditProfileInput,
    EditProfileOutput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
    UserType,
    failed,
)
from podcast_api.services.errors import DomainError
from podcast_api.services.users import UserService


def _service(info: Info[GraphQLContext, None]) -> UserService:
    return UserService(session=info.context.session, settings=info.context.settings)


@strawberry.type
class UserQuery:
    @strawberry.field(permission_classes=[IsAuthenticated])
    def me(self, info: Info[GraphQLContext, None]) -> UserType:
        return UserType.from_model(info.context.user)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def see_profile(self, info: Info[GraphQLContext, None], user_id: int) -> UserProfileOutput:
        try:
            user = await _service(info).get_profile(user_id)
        except DomainError as e:
            return failed(UserProfileOutput, e)
        return UserProfileOutput(ok=True, user=UserType.from_model(user))


@strawberry.type
class UserMutation:
    @strawberry.mutation
    async def create_account(
        self, info: Info[GraphQLContext, None], input: CreateAccountInput
    ) -> CreateAccountOutput:
        try:
            await _service(info).create_account(
                email=input.email, password=input.password, role=input.role
            )
        except DomainError as e:
            return failed(CreateAccountOutput, e)
        return CreateAccountOutput(ok=True)

    @strawberry.mutation
    async def login(self, info: Info[GraphQLContext, None], input: LoginInput) -> LoginOutput:
        try:
            token = await _service(info).login(email=input.email, password=input.password)
        except DomainError as e:
            return failed(LoginOutput, e)
        return LoginOutput(ok=True, token=token)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def edit_profile(
        self, info: Info[GraphQLContext, None], input: EditProfileInput
    ) -> EditProfileOutput:
        try:
            await _service(info).edit_profile(
                user=info.context.user, email=input.email, password=input.password
            )
        except DomainError as e:
            return failed(EditProfileOutput, e)
        return EditProfileOutput(ok=True)
