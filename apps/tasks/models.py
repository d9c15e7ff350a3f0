from django.db import models


DEFAULT_STATUS = 'open'


class Task(models.Model):
    """
    A single to-do item.
    Status is free text; only presence is enforced.
    """
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=32, default=DEFAULT_STATUS)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"#{self.pk} {self.title}"
