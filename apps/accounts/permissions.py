from rest_framework import permissions


class IsShopAdmin(permissions.BasePermission):
    """
    Permission: Only logged-in shop administrators.
    """

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_admin', False))


class IsShopAdminOrReadOnly(IsShopAdmin):
    """
    Permission: Anyone can read, only shop administrators can write.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True

        return super().has_permission(request, view)
